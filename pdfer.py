"""Main entry point for PDFer - a lightweight PDF viewer with a recent documents library and notes."""

import sys
import logging


def main():
    """Main entry point."""
    try:
        if len(sys.argv) == 1:
            from gui import run_gui
            run_gui()
        else:
            from cli import run_cli
            run_cli()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception:
        logging.exception("Error in PDFer")
        sys.exit(1)

if __name__ == "__main__":
    main()
