"""
發音系統抽象介面

比對層 (索引、模糊搜尋) 只依賴這個介面：
把文字轉成發音表示，並判斷兩個發音表示是否相近。
"""

from abc import ABC, abstractmethod


class PhoneticSystem(ABC):
    """發音系統抽象基類"""

    @abstractmethod
    def to_phonetic(self, text: str) -> str:
        """將文字轉換為發音表示"""
        pass

    @abstractmethod
    def are_fuzzy_similar(self, phonetic1: str, phonetic2: str) -> bool:
        """判斷兩個發音表示是否模糊相似"""
        pass

    @abstractmethod
    def get_tolerance(self, length: int) -> float:
        """根據長度回傳容錯率"""
        pass
