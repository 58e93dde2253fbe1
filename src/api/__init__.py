"""
API Module
---------
Serves the campground website using FastAPI and Jinja2 templates.
Features include:
- Listing, creating, editing and deleting campgrounds
- Adding and removing reviews on a campground
- Method override for HTML forms
- Rendered error pages
"""
