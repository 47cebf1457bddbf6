"""
Configuration management module for tvmkit.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation, and serialization.

- RootFinderConfig: numeric knobs of the Newton-Raphson solver. Defaults
  reproduce the reference solver exactly (1e-7, 20 iterations, guess 0.1).
- AppSettings: process settings read from ``TVMKIT_*`` environment variables
  or a ``.env`` file. Only logging is driven by them; numeric results never
  depend on the environment.

Example
-------
>>> from tvmkit.config import RootFinderConfig
>>> cfg = RootFinderConfig(max_iterations=50)
>>> find_root(lambda x: x * x - 2.0, 1.0, config=cfg)
1.414213562...
>>>
>>> # Serialize to dict/JSON
>>> cfg.model_dump()
{'precision': 1e-07, 'max_iterations': 50, 'default_guess': 0.1}
>>> RootFinderConfig.model_validate_json(cfg.model_dump_json())
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import PRECISION, MAX_ITERATIONS, DEFAULT_GUESS

__all__ = [
    "RootFinderConfig",
    "AppSettings",
    "configure_logging",
]


# ---------------------------------------------------------------------------
# Root Finder Configuration
# ---------------------------------------------------------------------------

class RootFinderConfig(BaseModel):
    """
    Configuration for the Newton-Raphson root finder.

    Attributes
    ----------
    precision : float
        Finite-difference step and convergence tolerance (> 0).
    max_iterations : int
        Iteration cap; the solver attempts at most ``max_iterations - 1``
        updates (>= 2).
    default_guess : float
        Starting point when the caller passes no guess.

    Examples
    --------
    >>> config = RootFinderConfig()
    >>> config.max_iterations
    20
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    precision: float = Field(
        default=PRECISION,
        gt=0.0,
        le=1e-2,
        description="Finite-difference step and convergence tolerance"
    )
    max_iterations: int = Field(
        default=MAX_ITERATIONS,
        ge=2,
        le=10_000,
        description="Iteration cap of the solver"
    )
    default_guess: float = Field(
        default=DEFAULT_GUESS,
        allow_inf_nan=False,
        description="Initial guess used when none is supplied"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with TVMKIT_ (e.g., TVMKIT_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    debug : bool
        Shortcut for DEBUG logging regardless of ``log_level``.
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR".

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'

    # With .env file:
    # TVMKIT_LOG_LEVEL=DEBUG
    >>> settings = AppSettings(_env_file=".env")
    >>> settings.log_level
    'DEBUG'
    """

    model_config = SettingsConfigDict(
        env_prefix="TVMKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )

    @property
    def effective_level(self) -> int:
        """Numeric logging level, with ``debug`` taking precedence."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


def configure_logging(settings: Optional[AppSettings] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``tvmkit`` logger at the configured level.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    settings = settings if settings is not None else AppSettings()
    logger = logging.getLogger("tvmkit")
    logger.setLevel(settings.effective_level)

    for handler in list(logger.handlers):
        if getattr(handler, "_tvmkit_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    handler._tvmkit_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
