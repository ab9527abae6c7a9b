"""Line frequency counting and the lock-guarded handle shared between threads."""
