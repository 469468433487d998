from GolayCode.data.bitmap import BitmapImage, load_bitmap, save_bitmap

__all__ = [
    "BitmapImage",
    "load_bitmap",
    "save_bitmap",
]
