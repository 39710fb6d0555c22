"""Markdown logger for gameplay events (pickups, hits, level clears, death)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.turn = 0
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# EscapE Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Turn Events\n\n")
                f.write("| Timestamp | Turn | Event | Details |\n")
                f.write("|-----------|------|-------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def set_turn(self, turn: int) -> None:
        self.turn = turn

    def log_event(self, event: str, details: str = "") -> None:
        """
        Log a gameplay event for the current turn.

        Parameters
        ----------
        event : str
            Short upper-case tag, e.g. ``FUEL`` or ``HIT``
        details : str, optional
            Free-form description
        """
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {self.turn} | {event} | {details} |\n")

        except OSError as e:
            print(f"Failed to log event: {e}")

    def log_level_up(self, level: int) -> None:
        """
        Log a level clear.

        Parameters
        ----------
        level : int
            Number of levels cleared so far
        """
        self.log_event("LEVEL UP", f"Cleared {level} level(s)")

    def log_death(self) -> None:
        self.log_event("DEAD", "Player health reached zero")
