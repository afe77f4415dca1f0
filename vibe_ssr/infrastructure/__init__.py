"""Infrastructure — logging setup and the real clock/RNG/timezone providers."""
