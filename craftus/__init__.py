"""Game logic of a block-building sandbox: blocks, chunks, player physics, input and sprite GUI."""

__version__ = "0.3.0"