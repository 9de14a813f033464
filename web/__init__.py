"""Browser front end for the Connect Four game."""
