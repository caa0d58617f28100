"""Application layer shared by user interfaces."""
