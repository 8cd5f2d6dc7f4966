"""Memo Desk - in-memory memo management with HTML/CSV reports."""
