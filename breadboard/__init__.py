"""Breadboard planner — placement and connectivity engine for solderless breadboards."""
