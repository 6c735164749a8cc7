"""
FastAPI REST API Layer for piccy-tts.

    - routes.py: GET /, /voices, /tts
    - middleware.py: GET-only guard, CORS headers, 404 envelope
    - responses.py: Pretty JSON, error envelope and audio builders
    - schemas.py: Pydantic envelope models
    - dependencies.py: Settings and SpeechService providers
"""
