"""Escape time engine: sample grids and the pruned Mandelbrot iteration.
"""
