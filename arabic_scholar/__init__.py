"""Arabic Scholar: an AI-powered Arabic dictionary and tutor."""
