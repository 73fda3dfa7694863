"""
handlers/ - Presentation Layer
================================
Telegram update handling. The dispatcher receives updates, keeps each chat's
pending question, and hands commands and answers to the handlers here, which
delegate to QuizService and send the response back to the chat.
No business logic lives here.
"""
