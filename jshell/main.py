#!/usr/bin/env python3
"""
jshell - main entry point

Startup sequence:
1. Load configuration (--config PATH, else the bundled config.json)
2. Initialize logging
3. Run the interactive shell until exit or end of input

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys
from typing import List, Optional

from jshell.core.config_loader import ConfigLoader
from jshell.exceptions import ConfigError
from jshell.logger import Logger, LogLevel, get_logger
from jshell.shell.shell import Shell


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'config.json')


def _config_path(argv: List[str]) -> Optional[str]:
    """Pick the configuration file named on the command line, if any."""
    if len(argv) > 1 and argv[0] == '--config':
        return argv[1]
    if os.path.exists(DEFAULT_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for jshell.
    
    Args:
        argv: Command-line arguments without the program name
    
    Returns:
        Process exit status
    """
    argv = sys.argv[1:] if argv is None else argv
    
    loader = ConfigLoader()
    path = _config_path(argv)
    
    try:
        if path is not None:
            loader.load(path)
        level = LogLevel.from_name(loader.config.logging.level)
    except (ConfigError, ValueError) as e:
        print(f"jshell: {getattr(e, 'message', e)}", file=sys.stderr)
        return 2
    
    config = loader.config
    Logger.initialize(
        level=level,
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
        use_colors=config.logging.use_colors,
    )
    get_logger('main').info("Shell starting", context={'config': path})
    
    return Shell().run()


if __name__ == '__main__':
    sys.exit(main())
