"""Django app exposing the covenant looking glass and AI Frens over HTTP."""
