"""Interactive visualizer for raster line and circle drawing algorithms."""
