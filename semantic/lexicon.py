"""
semantic/lexicon.py — stałe słowniki i wzorce klasyfikatora nagłówków.

Wszystko tutaj jest tylko do odczytu i budowane raz przy imporcie modułu:
  ACTION_WORDS        — czasowniki instrukcji / akcji UI (wykluczenie)
  HEADING_KEYWORDS    — rzeczowniki strukturalne (sygnał pozytywny)
  CHAPTER_INDICATORS  — jednostki podziału dokumentu (章, 节, Rozdział, ...)
  NUMBERING_PATTERNS  — wzorce numeracji rozdziałów (sygnał pozytywny)
  EXCLUSION_PATTERNS  — oczywiste nie-nagłówki (wykluczenie)

Wpisy CJK dopasowujemy jako podciągi, wpisy alfabetu łacińskiego jako
całe słowa, bez rozróżniania wielkości liter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Słowniki
# ---------------------------------------------------------------------------

ACTION_WORDS: frozenset[str] = frozenset({
    # zh
    "点击", "选择", "输入", "打开", "关闭", "设置", "配置", "进入", "退出",
    "保存", "删除", "修改", "查看", "操作", "执行", "运行", "启动", "停止",
    "添加", "移除", "编辑", "更新", "刷新", "重置", "清除", "导入", "导出",
    "上传", "下载", "发送", "接收", "连接", "断开", "登录", "登出", "注册",
    "提交", "取消", "确认", "拒绝", "同意", "申请", "审批", "通过", "驳回",
    # en
    "click", "tap", "press", "select", "choose", "save", "delete", "remove",
    "submit", "cancel", "confirm", "upload", "download", "drag", "log in",
    "sign in", "double-click", "right-click",
    # pl
    "kliknij", "wybierz", "naciśnij", "wpisz", "zapisz", "usuń", "zaznacz",
    "przeciągnij", "zaloguj", "potwierdź", "anuluj",
})

HEADING_KEYWORDS: frozenset[str] = frozenset({
    # zh
    "管理", "系统", "功能", "概述", "介绍", "说明", "中心", "平台", "工具",
    "环境", "配置", "设置", "模块", "组件", "服务", "接口", "协议", "标准",
    "规范", "流程", "方案", "策略", "政策", "制度", "规则", "原则", "方法",
    "技术", "架构", "框架", "结构", "设计", "开发", "部署", "运维", "监控",
    "安全", "权限", "认证", "授权", "加密", "解密", "备份", "恢复", "容灾",
    "性能", "优化", "调优", "测试", "验证", "评估", "分析", "统计", "报告",
    # en
    "system", "overview", "introduction", "module", "architecture", "design",
    "configuration", "management", "appendix", "summary", "conclusion",
    "requirements", "deployment", "security", "reference", "glossary",
    # pl
    "wstęp", "wprowadzenie", "przegląd", "system", "moduł", "architektura",
    "konfiguracja", "podsumowanie", "załącznik", "słownik", "wymagania",
})

CHAPTER_INDICATORS: frozenset[str] = frozenset({
    "章", "节", "部分", "篇", "卷", "册", "编", "辑", "集", "段", "条", "款", "项",
})


def _is_cjk(word: str) -> bool:
    return any("㐀" <= ch <= "鿿" for ch in word)


def _word_regex(words: frozenset[str]) -> re.Pattern[str] | None:
    latin = sorted((w for w in words if not _is_cjk(w)), key=len, reverse=True)
    if not latin:
        return None
    alternatives = "|".join(re.escape(w) for w in latin)
    return re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE | re.UNICODE)


_ACTION_CJK = tuple(w for w in ACTION_WORDS if _is_cjk(w))
_ACTION_LATIN_RE = _word_regex(ACTION_WORDS)
_KEYWORD_CJK = tuple(w for w in HEADING_KEYWORDS if _is_cjk(w))
_KEYWORD_LATIN_RE = _word_regex(HEADING_KEYWORDS)


def contains_action_word(text: str) -> bool:
    if any(w in text for w in _ACTION_CJK):
        return True
    return bool(_ACTION_LATIN_RE and _ACTION_LATIN_RE.search(text))


def contains_heading_keyword(text: str) -> bool:
    if any(w in text for w in _KEYWORD_CJK):
        return True
    return bool(_KEYWORD_LATIN_RE and _KEYWORD_LATIN_RE.search(text))


# ---------------------------------------------------------------------------
# Wzorce
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextPattern:
    name:  str
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


def _p(pattern: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(pattern, flags | re.UNICODE)


_CN_DIGITS = "一二三四五六七八九十百零〇"
_CHAPTER_UNITS = "|".join(sorted(CHAPTER_INDICATORS, key=len, reverse=True))

NUMBERING_PATTERNS: tuple[TextPattern, ...] = (
    # 第一章, 第2节, 第三部分, 第5条
    TextPattern("chapter_cn", _p(rf"^第\s*[{_CN_DIGITS}\d]+\s*(?:{_CHAPTER_UNITS})")),
    # 1.  1.2.  1.2.3、
    TextPattern("decimal", _p(r"^\d+(\.\d+)*[\.、]")),
    # 一、 二．
    TextPattern("cn_enumerator", _p(rf"^[{_CN_DIGITS}]+[、．.]")),
    # (1) (一) （二）
    TextPattern("parenthesized", _p(rf"^[(（][{_CN_DIGITS}\d]+[)）]")),
    # ① ② ... ⑳
    TextPattern("circled", _p(r"^[①-⑳]")),
    # A. B.
    TextPattern("latin_letter", _p(r"^[A-Z]\.")),
    # Chapter 3, Rozdział II
    TextPattern("chapter_word", _p(r"^(Chapter|Rozdzia[łl])\s+[\dIVXLC]+\b", re.IGNORECASE)),
)

EXCLUSION_PATTERNS: tuple[TextPattern, ...] = (
    TextPattern("digits_only",  _p(r"^\d+$")),
    TextPattern("page_cn",      _p(r"^第\s*\d+\s*页$")),
    TextPattern("page_label",   _p(r"^(Page|Strona)\s+\d+$", re.IGNORECASE)),
    TextPattern("dot_leader",   _p(r"\.{5,}")),
    TextPattern("ip_address",   _p(r"\d+\.\d+\.\d+\.\d+")),
    TextPattern("port",         _p(r":\d+")),
    TextPattern("url_or_email", _p(r"^www\.|^http|@", re.IGNORECASE)),
    TextPattern("date",         _p(r"^\d{4}[-/]\d{1,2}[-/]\d{1,2}")),
    TextPattern("digit_run",    _p(r"^[\d\s\-+()]{10,}$")),
)


def has_chapter_numbering(text: str) -> bool:
    return any(p.matches(text) for p in NUMBERING_PATTERNS)


def is_obviously_not_heading(text: str) -> bool:
    return any(p.matches(text) for p in EXCLUSION_PATTERNS)
