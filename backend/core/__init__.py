"""Core module - Logging, middleware and request validation"""
