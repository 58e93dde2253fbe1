"""
Seed Module
-------------
Wipes the database and fills it with randomly generated sample campgrounds.
Runs on its own (`python -m src.seeds.seed`), never inside the web server.
"""
