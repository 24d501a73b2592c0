"""Course management backend: instructors, students, courses, reviews and enrollments."""

__version__ = "0.1.0"
