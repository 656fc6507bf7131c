"""Editor services: drag handling, preview geometry, export compositing"""
