import matplotlib

# Headless backend so plotting tests never open a window
matplotlib.use("Agg")
