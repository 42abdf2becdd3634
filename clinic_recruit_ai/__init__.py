"""Clinic Recruit AI: structured extraction of job postings and competitor pages from a URL."""
