import os

import cv2
import numpy as np
from cv2.typing import MatLike
from numpy.typing import NDArray


def load_image(image_path: str) -> MatLike:
    """
    Load an image from the specified path.

    Args:
        image_path: Path to the image file

    Returns:
        numpy array containing the image data in BGR format

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the file exists but isn't a valid image format
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Image file not found: {image_path}")

    img = cv2.imread(image_path)

    if img is None:
        raise ValueError(f"Invalid image format or corrupted file: {image_path}")

    return img


def grayscale(img: MatLike) -> MatLike:
    if len(img.shape) == 2:
        return img
    return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)


def resize_if_needed(img: MatLike,
                     min_dimension: int = 1000,
                     max_dimension: int = 3000) -> MatLike:
    """
    Resize image only if too small (upscale) or too large (downscale).
    Maintains aspect ratio; neither side ends up above max_dimension.

    Args:
        img: Input image
        min_dimension: Target for the shorter side of small images
        max_dimension: Upper bound for the longer side

    Returns:
        Resized image or original if already within bounds
    """
    height, width = img.shape[:2]
    min_side = min(height, width)
    max_side = max(height, width)

    if min_side < min_dimension:
        scale = min(min_dimension / min_side, max_dimension / max_side)
    elif max_side > max_dimension:
        scale = max_dimension / max_side
    else:
        return img

    if scale == 1:
        return img

    new_size = (max(1, int(width * scale)), max(1, int(height * scale)))
    interpolation = cv2.INTER_CUBIC if scale > 1 else cv2.INTER_AREA
    return cv2.resize(img, new_size, interpolation=interpolation)


def denoise_bilateral(gray_img: MatLike,
                      d: int = 9,
                      sigma_color: int = 75,
                      sigma_space: int = 75) -> MatLike:
    """Edge-preserving noise reduction; keeps strokes sharp."""
    return cv2.bilateralFilter(gray_img, d, sigma_color, sigma_space)


def binarize_otsu(gray_img: MatLike) -> MatLike:
    """
    Apply Otsu's automatic thresholding.

    Returns:
        Binary image (black text on white background)
    """
    _, binary = cv2.threshold(gray_img, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
    return binary


def preprocess_for_ocr(image_path: str) -> NDArray[np.uint8]:
    """
    Clean up a scanned image before recognition.

    Pipeline: load -> resize if needed -> grayscale -> bilateral denoise -> Otsu.

    Args:
        image_path: Path to the image file

    Returns:
        Binary image ready for OCR
    """
    img: MatLike = load_image(image_path)
    img = resize_if_needed(img)
    gray: MatLike = grayscale(img)
    gray = denoise_bilateral(gray)

    binary: MatLike = binarize_otsu(gray)
    return np.asarray(binary, dtype=np.uint8)
