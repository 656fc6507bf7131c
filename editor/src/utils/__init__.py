"""Shared helpers: error kinds, logging, paths and transform math"""
