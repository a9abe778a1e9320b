"""
FastAPI backend for the Bulk Location Importer.
"""
