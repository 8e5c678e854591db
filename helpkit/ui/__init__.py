# helpkit/ui/__init__.py
# UI components: logger, theming & usage help rendering
