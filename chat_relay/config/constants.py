"""
Relay defaults.

Values here are used when the corresponding ``RELAY_*`` environment variable
is not set. See chat_relay/config/settings.py for the variable names.
"""

# Provider endpoints
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
OPENAI_BASE_URL = "https://api.openai.com/v1"

DEFAULT_MODELS = {
    "gemini": "gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}

# Environment variables checked for the API key, in order, per provider
API_KEY_ENV_VARS = {
    "gemini": ("RELAY_API_KEY", "GEMINI_API_KEY"),
    "openai": ("RELAY_API_KEY", "OPENAI_API_KEY"),
}

# Persona used by the primed policies
DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a friendly customer support assistant for an online store. "
    "Answer briefly and politely. If you do not know an order's status, "
    "ask the customer for their order ID."
)
DEFAULT_OPENING_LINE = "Hello! I'm the store assistant. How can I help you today?"

# Returned when the provider answers without any usable candidate text
FALLBACK_REPLY = "I'm sorry, I couldn't process that response."

# Outbound call deadline
DEFAULT_TIMEOUT_SECONDS = 30.0
