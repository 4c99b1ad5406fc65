import logging
import sys
import traceback

import click

# To use it:
# handler = CrashHandler()
# handler.install()
class CrashHandler:
    def __init__(self, logger_name="FatalError", log_path=None):
        self.logger = logging.getLogger(logger_name)
        self.log_path = log_path
        self.original_excepthook = sys.excepthook

    def install(self):
        """Register the crash handler for uncaught exceptions."""
        sys.excepthook = self.handle_exception

    def uninstall(self):
        sys.excepthook = self.original_excepthook

    def format_exception(self, t, e, tb):
        try:
            return "".join(traceback.format_exception(t, e, tb))
        except Exception:
            return f"{getattr(t, '__name__', 'Exception')}: {e}"

    def show_message(self, t, e):
        where = f" Details were written to {self.log_path}." if self.log_path else ""
        click.echo(f"\nPlanTings crashed: {getattr(t, '__name__', 'Exception')}: {e}.{where}", err=True)

    def handle_exception(self, t, e, tb):
        """The main hook called by Python on crash."""
        # Ctrl+C is a normal way to leave the game
        if issubclass(t, KeyboardInterrupt):
            click.echo("\nGoodbye!", err=True)
            return None

        self.logger.critical("Fatal error\n%s", self.format_exception(t, e, tb))
        self.show_message(t, e)
        return self.original_excepthook(t, e, tb)
