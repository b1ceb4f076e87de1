"""Investment portfolio tracker."""
