"""NiceGUI interface - thin visualization layer over the assistant controllers.

Responsibilities:
    - PDF upload picker with status banner
    - Question box with Enter-to-submit
    - Current answer and newest-first chat history display

Contains no request logic. Delegates uploads and questions to the controllers
and redraws from the session state.
"""
