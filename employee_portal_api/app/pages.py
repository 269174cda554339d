"""
HTML pages served by the demo.

The three pages are self‑contained documents (inline CSS and script)
rendered from ``string.Template`` strings.  All behaviour after the
page loads happens in the browser:

* the login page posts credentials to ``/api/login``, keeps the
  returned user in ``sessionStorage`` and moves on to ``/dashboard``;
* the dashboard reads that user back, refreshes ``/health`` and
  ``/api/products``, and "logs out" by clearing ``sessionStorage``.

The server keeps no session of its own.
"""

import html
from datetime import datetime
from string import Template
from typing import Optional


_BASE_STYLE = """
        body { font-family: system-ui; margin: 40px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); min-height: 100vh; }
        .btn { display: inline-block; background: #007bff; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px; margin: 10px; border: none; cursor: pointer; }
"""

_LANDING = Template("""<!DOCTYPE html>
<html lang="zh-TW">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>${project_name} v${version}</title>
    <style>${base_style}
        .container { max-width: 800px; margin: 0 auto; background: white; padding: 40px; border-radius: 15px; }
        .success { background: #28a745; color: white; padding: 20px; border-radius: 10px; text-align: center; margin-bottom: 30px; }
        h1 { color: #2c3e50; text-align: center; }
        .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(250px, 1fr)); gap: 20px; margin-top: 30px; }
        .card { background: #f8f9fa; padding: 20px; border-radius: 8px; }
    </style>
</head>
<body>
    <div class="container">
        <div class="success">
            <h2>🎉 全新部署成功！</h2>
            <p>${project_name} v${version} 正常運行</p>
        </div>
        <h1>🚀 ${project_name}</h1>
        <div class="cards">
            <div class="card">
                <h3>📊 系統狀態</h3>
                <p>版本: ${version}</p>
                <p>狀態: 運行正常</p>
                <a href="/health" class="btn">健康檢查</a>
            </div>
            <div class="card">
                <h3>📋 API 服務</h3>
                <p>所有端點正常</p>
                <a href="/api/products" class="btn">產品管理</a>
                <a href="/api/inventory" class="btn">庫存管理</a>
                <a href="/api/login" class="btn">員工登入</a>
            </div>
        </div>
        <p style="text-align: center; margin-top: 30px; color: #6c757d;">
            🕐 部署時間: ${rendered_at}
        </p>
    </div>
</body>
</html>""")

_LOGIN = Template("""<!DOCTYPE html>
<html lang="zh-TW">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>員工登入 - ${project_name}</title>
    <style>${base_style}
        body { display: flex; align-items: center; justify-content: center; }
        .login-box { background: white; padding: 40px; border-radius: 15px; max-width: 400px; width: 100%; }
        input { width: 100%; padding: 12px; margin: 8px 0; border: 1px solid #ddd; border-radius: 6px; box-sizing: border-box; }
        button { width: 100%; padding: 15px; background: #007bff; color: white; border: none; border-radius: 6px; font-size: 16px; cursor: pointer; }
        .test-accounts { background: #f8f9fa; padding: 15px; border-radius: 8px; margin-top: 15px; }
        .account { margin: 5px 0; cursor: pointer; padding: 8px; background: white; border-radius: 4px; }
        .account:hover { background: #e3f2fd; }
    </style>
</head>
<body>
    <div class="login-box">
        <h2 style="text-align: center; color: #2c3e50;">🔐 員工登入</h2>
        <form id="login-form">
            <input type="text" id="username" placeholder="員工帳號" required>
            <input type="password" id="password" placeholder="登入密碼" required>
            <button type="submit">登入系統</button>
        </form>
        <div class="test-accounts">
            <strong>測試帳號:</strong>
            <div class="account" onclick="fill('test', '123456')">test / 123456</div>
            <div class="account" onclick="fill('admin', 'admin123')">admin / admin123</div>
        </div>
        <div id="result" style="margin-top: 15px; padding: 10px; border-radius: 6px; display: none;"></div>
    </div>

    <script>
        function fill(u, p) {
            document.getElementById('username').value = u;
            document.getElementById('password').value = p;
        }

        function show(ok, text) {
            const result = document.getElementById('result');
            result.style.display = 'block';
            result.style.background = ok ? '#d4edda' : '#f8d7da';
            result.style.color = ok ? '#155724' : '#721c24';
            result.textContent = (ok ? '✅ ' : '❌ ') + text;
        }

        document.getElementById('login-form').onsubmit = async function (e) {
            e.preventDefault();
            const username = document.getElementById('username').value;
            const password = document.getElementById('password').value;
            try {
                const response = await fetch('/api/login', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({ username, password })
                });
                const data = await response.json();
                show(data.success, data.message);
                if (data.success) {
                    sessionStorage.setItem('user', JSON.stringify(data.user));
                    setTimeout(function () { window.location.href = '/dashboard'; }, 1500);
                }
            } catch (error) {
                show(false, '連接失敗，請重試');
            }
        };
    </script>
</body>
</html>""")

_DASHBOARD = Template("""<!DOCTYPE html>
<html lang="zh-TW">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>管理主控台 - ${project_name}</title>
    <style>${base_style}
        .container { max-width: 1000px; margin: 0 auto; background: white; padding: 30px; border-radius: 15px; }
        .header { display: flex; justify-content: space-between; align-items: center; }
        .btn.danger { background: #e74c3c; }
        .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 20px; margin-top: 20px; }
        .card { background: #f8f9fa; padding: 20px; border-radius: 8px; }
        table { width: 100%; border-collapse: collapse; }
        th, td { text-align: left; padding: 6px; border-bottom: 1px solid #ddd; }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1 style="color: #2c3e50;">🏠 管理主控台</h1>
            <div>
                <span id="welcome">👤 訪客</span>
                <button id="logout" class="btn danger">登出</button>
            </div>
        </div>
        <div class="cards">
            <div class="card">
                <h3>📊 系統狀態</h3>
                <p>狀態: <span id="health-status">載入中...</span></p>
                <p>版本: <span id="health-version">${version}</span></p>
                <p>更新時間: <span id="health-time">-</span></p>
                <button id="refresh" class="btn">重新整理</button>
            </div>
            <div class="card">
                <h3>📦 產品管理</h3>
                <table>
                    <thead><tr><th>編號</th><th>名稱</th><th>價格</th><th>庫存</th></tr></thead>
                    <tbody id="products"><tr><td colspan="4">載入中...</td></tr></tbody>
                </table>
                <p>共 <span id="product-count">0</span> 項產品</p>
            </div>
        </div>
    </div>

    <script>
        const stored = sessionStorage.getItem('user');
        if (stored) {
            try {
                const user = JSON.parse(stored);
                document.getElementById('welcome').textContent = '👤 ' + user.name;
            } catch (error) {
                sessionStorage.removeItem('user');
            }
        }

        async function loadHealth() {
            try {
                const data = await (await fetch('/health')).json();
                document.getElementById('health-status').textContent = data.status === 'healthy' ? '✅ 運行正常' : data.status;
                document.getElementById('health-version').textContent = data.version;
                document.getElementById('health-time').textContent = new Date(data.timestamp).toLocaleString('zh-TW');
            } catch (error) {
                document.getElementById('health-status').textContent = '❌ 無法連接';
            }
        }

        async function loadProducts() {
            const body = document.getElementById('products');
            try {
                const data = await (await fetch('/api/products')).json();
                body.innerHTML = '';
                data.data.forEach(function (p) {
                    const row = document.createElement('tr');
                    [p.id, p.name, p.price, p.stock].forEach(function (value) {
                        const cell = document.createElement('td');
                        cell.textContent = value;
                        row.appendChild(cell);
                    });
                    body.appendChild(row);
                });
                document.getElementById('product-count').textContent = data.count;
            } catch (error) {
                body.innerHTML = '<tr><td colspan="4">❌ 載入失敗</td></tr>';
            }
        }

        document.getElementById('refresh').onclick = function () { loadHealth(); loadProducts(); };
        document.getElementById('logout').onclick = function () {
            sessionStorage.clear();
            window.location.href = '/api/login';
        };

        loadHealth();
        loadProducts();
    </script>
</body>
</html>""")


def format_local_time(now: Optional[datetime] = None) -> str:
    """Format a timestamp the way the landing page shows it."""
    now = now or datetime.now()
    return now.strftime("%Y/%m/%d %H:%M:%S")


def render_landing(project_name: str, version: str, now: Optional[datetime] = None) -> str:
    return _LANDING.substitute(
        project_name=html.escape(project_name),
        version=html.escape(version),
        rendered_at=format_local_time(now),
        base_style=_BASE_STYLE,
    )


def render_login(project_name: str) -> str:
    return _LOGIN.substitute(project_name=html.escape(project_name), base_style=_BASE_STYLE)


def render_dashboard(project_name: str, version: str) -> str:
    return _DASHBOARD.substitute(
        project_name=html.escape(project_name),
        version=html.escape(version),
        base_style=_BASE_STYLE,
    )
