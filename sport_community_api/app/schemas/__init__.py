"""
Pydantic schema definitions for API payloads.

Each domain (users, media, posts, articles, events, sports, profiles)
defines its own Pydantic models for request and response bodies.
Response models mirror the table columns so rows can be returned
as stored.
"""
