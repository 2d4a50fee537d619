"""Abstracciones del Core (Protocol) que implementan los adaptadores."""
