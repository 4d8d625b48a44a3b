"""Infrastructure adapters: XML output, save hosts, logging and wiring."""
