"""Lecture transcription and summarization API."""
