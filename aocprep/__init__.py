"""aocprep — scaffold Advent of Code day folders and fetch their inputs."""
