"""qrsvg のコア（色・行列・配置・実行時設定）。"""
