"""GreenCity 백엔드 — 장소, 습관, 에코뉴스 댓글 API.

GreenCity backend: places, habits and EcoNews comments.
"""
