"""Builtin provider adapters, loaded by name through DescriptorLoader."""
