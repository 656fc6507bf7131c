"""Command handlers used by the main window (composition pattern)"""
