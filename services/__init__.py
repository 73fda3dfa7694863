"""
services/ - Business Logic Layer
================================
Quiz grading and rendering, command parsing, and the Telegram API gateway.
Handlers call into this layer; it calls into repositories.
"""
