"""
Glog style output on stdout
"""

import sys

from template_logging import GlogFormatter, LoggerConfig, TemplateLogger


def main():
    log = TemplateLogger(sys.stdout.buffer, GlogFormatter(), LoggerConfig())
    log.print("Hello there!")
    log.info("%d workers started", 4)


if __name__ == "__main__":
    main()
