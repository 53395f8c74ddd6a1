"""Exception hierarchy for game failures."""


class GameError(RuntimeError):
    """Base class for every game-related error."""

    prefix = ""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"Game Error: {self.prefix}{message}")


class EngineInitError(GameError):
    """The graphics engine or one of its subsystems failed to start."""

    prefix = "Engine Initialization Failed - "


class DisplayCreationError(GameError):
    """The game window could not be created."""

    prefix = "Display Creation Failed - "


class TimerCreationError(GameError):
    """The frame timer could not be created."""

    prefix = "Timer Creation Failed - "


class EventQueueCreationError(GameError):
    """The event queue could not be created."""

    prefix = "Event Queue Creation Failed - "


class AssetLoadError(GameError):
    """A sprite, font or other asset could not be loaded."""

    prefix = "Asset Loading Failed - "


class FileError(GameError):
    """The user register file could not be opened."""

    prefix = "Opening User Register File Failed - "