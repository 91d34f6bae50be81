"""Scriptographer About dialog: grid layout engine and clickable text lines."""
