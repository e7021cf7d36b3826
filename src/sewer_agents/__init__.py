"""Scripted diver agents for seek-and-scram sewer mazes."""
