"""A pocket goose pet: canvas, sprites, save data, chatter and frame-stepped mini-games."""

__version__ = "0.1.0"
__all__ = ["canvas", "bitmaps", "savegame", "petlines", "flappybird", "particlesim", "pong", "veridium"]