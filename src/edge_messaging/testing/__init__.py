"""Testing utilities – fakes and pytest fixtures for the messaging extension."""
