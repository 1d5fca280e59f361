"""Generator configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Generator settings loaded from environment variables."""

    # Extent used when no geometry is supplied (min_x, min_y, max_x, max_y)
    default_extent: tuple[float, float, float, float] = (0.0, 0.0, 100.0, 100.0)

    # Precision grid cells per unit for Truchet tile snapping
    snap_scale: float = 10000.0

    # Default Halton bases (should be coprime)
    halton_bases: tuple[int, int] = (2, 3)

    # Seed for the default random source; unseeded when None
    seed: int | None = None

    # Logging
    log_level: str = "info"

    class Config:
        env_prefix = "SHAPEGEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
