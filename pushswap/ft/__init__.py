"""Helpers for characters, memory, conversions, strings, lists and stream output."""