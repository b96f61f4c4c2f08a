"""Runtime services shared by the engine."""
