"""Route surface — endpoint paths and methods consumed by server and client."""
