"""Hello-world cloud native workload."""
