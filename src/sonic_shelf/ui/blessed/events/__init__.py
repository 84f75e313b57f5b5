"""Keyboard dispatch and command execution for the blessed UI."""
