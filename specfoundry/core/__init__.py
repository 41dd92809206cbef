"""Calculator engines: units, geometry, materials, tolerances, threads and shop math."""
