"""Map interfaces."""

from .map_interfaces import Location, Mask, Visualize, Partition, PartitionAlgorithm

__all__ = ['Location', 'Mask', 'Visualize', 'Partition', 'PartitionAlgorithm']
