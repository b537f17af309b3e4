from enum import StrEnum


class ScreenType(StrEnum):
    TWO_D = '2D'
    THREE_D = '3D'
    TWO_D_THREE_D = '2D_3D'
