"""
Request Models Module
----------------
Contains Pydantic models that validate form submissions before they reach the database.
Defines the accepted shape of campground and review data, independent of the ORM tables.
"""
