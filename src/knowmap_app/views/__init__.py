"""Views (Qt widgets) for the KnowMap app."""
