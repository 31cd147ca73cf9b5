"""Excel reporting"""
