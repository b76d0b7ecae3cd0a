# api - HTTP surface for the electruss engine
