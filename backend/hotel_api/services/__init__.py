"""
Services Module

Store-facing operations used by the API routers:
- users: registration, credential checks, profile management
- hotels: hotel CRUD and aggregate counts
- rooms: room CRUD, hotel membership and room-number availability
"""
