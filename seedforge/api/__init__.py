"""HTTP service exposing seeded generators and noise fields."""
