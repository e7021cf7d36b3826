"""Scripted agents, one subpackage per agent."""
