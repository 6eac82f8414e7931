"""Core modules for the Crypto Dashboard application."""

from . import insights, synth, utils, viz

__all__ = [
	"insights",
	"synth",
	"utils",
	"viz",
]
