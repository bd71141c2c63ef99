"""Ace Escape: a small 2D arcade game on pygame, with a Breakout clone and a settings-menu demo."""

__version__ = "0.1.0"