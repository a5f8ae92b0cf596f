"""Test-side helpers for composing report invocations."""

from .input_builder import InvocationBuilder

__all__ = ["InvocationBuilder"]
