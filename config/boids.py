"""Configuration for the 2D boids flocking simulation."""

WINDOW = {
    "width": 800,
    "height": 400,
    "panel_height": 96,     # Slider strip below the canvas
    "title": "Boids",
    "fps": 60
}

BOIDS = {
    "count": 100,
    "max_speed": 4.0,
    "max_force": 0.2,
    "initial_speed": 4.0,       # Upper bound of the random starting speed
    "size": 8.0,                # Triangle length in pixels

    # Flocking behavior
    "perception_radius": 50.0,  # How far boids can see neighbors
    "topology": "euclidean",    # "euclidean" or "toroidal" neighbor distances
}

SLIDERS = {
    "min": 0.0,
    "max": 5.0,
    "default": 0.1,
    "track_width": 240,
    "row_height": 28,
    "margin": 12,
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "panel": (0.08, 0.08, 0.1, 1.0),
    "boid": (1.0, 1.0, 1.0),
    "slider_track": (0.35, 0.35, 0.4),
    "slider_knob": (0.9, 0.9, 0.95),
    "text": (0.9, 0.9, 0.9)
}
