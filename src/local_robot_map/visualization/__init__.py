from .map_image import labels_to_luma, labels_to_rgb, save_image, to_image

__all__ = ['labels_to_luma', 'labels_to_rgb', 'save_image', 'to_image']
