"""
Application configuration.

All configuration values are centralized here for easy management
and environment-specific overrides.
"""

from dataclasses import dataclass


@dataclass
class Config:
    """Main application configuration."""

    # ─────────────────────────────────────────────────────────────────────────
    # Display Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Native resolution (the square is always drawn at this size)
    native_width: int = 400
    native_height: int = 400

    # Display scaling (1 = native, 2 = 800x800, ...)
    scale_factor: int = 1

    # Fullscreen mode
    fullscreen: bool = False

    # Target frame rate (one animation tick per frame)
    target_fps: int = 60

    # ─────────────────────────────────────────────────────────────────────────
    # Scene Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Side of the square world window mapped onto the surface
    world_window: float = 5.0

    # Degrees subtracted from the rotation angle every tick
    rotation_step: float = 2.0

    # ─────────────────────────────────────────────────────────────────────────
    # Development Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Development mode (FPS overlay; the --dev flag also selects debug logging)
    dev_mode: bool = False

    # Show FPS counter
    show_fps: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Computed Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def window_width(self) -> int:
        """Get actual window width (native * scale)."""
        return self.native_width * self.scale_factor

    @property
    def window_height(self) -> int:
        """Get actual window height (native * scale)."""
        return self.native_height * self.scale_factor

    @property
    def native_size(self) -> tuple[int, int]:
        """Get native resolution as tuple."""
        return (self.native_width, self.native_height)

    @property
    def window_size(self) -> tuple[int, int]:
        """Get window size as tuple."""
        return (self.window_width, self.window_height)

    def __post_init__(self):
        """Validate sizes and apply dev mode defaults."""
        if self.native_width <= 0 or self.native_height <= 0:
            raise ValueError(
                f"Native size must be positive, got {self.native_width}x{self.native_height}"
            )
        if self.scale_factor < 1:
            raise ValueError(f"Scale factor must be >= 1, got {self.scale_factor}")
        if self.target_fps <= 0:
            raise ValueError(f"Target FPS must be positive, got {self.target_fps}")
        if self.world_window <= 0:
            raise ValueError(f"World window must be positive, got {self.world_window}")

        if self.dev_mode:
            self.show_fps = True


# Default configuration instances
DEFAULT_CONFIG = Config()
DEV_CONFIG = Config(dev_mode=True, scale_factor=2)
