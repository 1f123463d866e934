"""
Entry point for the developer console REPL.
"""

import logging
import sys

from console.client import DevConsole, create_console
from utils.logger import get_logger, set_level
from utils.validation import ValidationUtils

logger = get_logger("Main")


def run(dev_console: DevConsole) -> None:
    """Read and execute lines until quit or end of input."""
    dev_console.start()
    prompt = dev_console.config.PROMPT

    while dev_console.running:
        try:
            line = dev_console.output.console.input(prompt)
        except EOFError:
            break

        dev_console.input_buffer.set(ValidationUtils.sanitize_input(line))
        if dev_console.input_buffer:
            dev_console.submit()

    dev_console.stop()


def main():
    """Main entry point."""
    try:
        dev_console = create_console()
        if dev_console.config.DEBUG:
            set_level(logging.DEBUG)
        if dev_console.config.GREETING:
            dev_console.write_line("[b]Developer console[/b]. Type [b]help[/b] to get started.")
        run(dev_console)
    except KeyboardInterrupt:
        logger.info("Console stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
