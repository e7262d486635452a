"""Application layer for Headlines: UI state, controllers, views and renderers."""
