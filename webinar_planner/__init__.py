"""Webinar planner: schedule webinars and manage their seat capacity."""
