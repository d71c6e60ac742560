"""HTTP blueprints, one subpackage per URL area."""
