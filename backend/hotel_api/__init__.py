"""Hotel booking REST backend: hotels, rooms, users and cookie/JWT auth."""
