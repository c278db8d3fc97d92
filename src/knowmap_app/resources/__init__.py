"""Stylesheets for the KnowMap app."""
