"""
Domain Layer

包含應用程序的核心領域模型和業務邏輯，按功能領域分為多個子模塊：

- catalog: 目錄元件與 API 記錄，以及記錄來源
- architecture: bounded context 探索與 context 關係推斷
- common: 共用的基礎模型
"""
