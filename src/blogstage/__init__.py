"""Blogstage - post listing and pagination rendering for static blogs."""
