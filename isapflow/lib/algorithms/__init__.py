"""Flow algorithms over `isapflow.lib.graph.ResidualGraph`."""
