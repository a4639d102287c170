"""Foundation layer: exceptions, logging and run observers."""
