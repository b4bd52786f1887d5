"""API and page routers"""
