"""Infrastructure layer: configuration, logging, events, operations and i18n."""
