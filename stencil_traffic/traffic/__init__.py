"""Traffic generators."""

from .stencil_generator import StencilTrafficGenerator

__all__ = ["StencilTrafficGenerator"]
