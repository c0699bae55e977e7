"""Infrastructure adapters: logging, settings and balance/price sources."""
