"""Benchmark scripts for the fluid grid."""
