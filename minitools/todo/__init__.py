"""A minimal JSON-backed to-do list."""