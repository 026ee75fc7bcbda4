"""Single-screen HTML page for the scaler API."""

UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Recipe Serving Adjuster</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .muted { color: #777; }
      .ingredient-item { cursor: pointer; padding: 0.2rem 0; }
      .tab.active { font-weight: bold; text-decoration: underline; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Recipe Serving Adjuster</h1>
    <div class="row">
      <input id="original-servings" type="number" placeholder="Original servings" />
      <input id="target-servings" type="number" placeholder="Target servings" />
    </div>
    <div class="row">
      <input id="ingredient-name" placeholder="Ingredient" />
      <input id="ingredient-qty" type="number" placeholder="Quantity" />
      <select id="ingredient-unit"></select>
      <button onclick="addIngredient()">Add</button>
    </div>
    <div id="ingredient-items" class="row"></div>
    <div class="row">
      <button onclick="calculate()">Calculate</button>
      <button class="tab" data-mode="scaled" onclick="setMode('scaled')">Scaled</button>
      <button class="tab" data-mode="summary" onclick="setMode('summary')">Summary</button>
    </div>
    <pre id="tab-output">Ready.</pre>
    <script>
      async function call(method, path, body) {
        const res = await fetch(path, {
          method: method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined
        });
        const data = await res.json();
        if (!res.ok) {
          alert(data.detail || ('Error: ' + res.status));
          return null;
        }
        return data;
      }

      function renderIngredients(data) {
        const list = document.getElementById('ingredient-items');
        list.innerHTML = '';
        if (data.ingredients.length === 0) {
          list.innerHTML = '<p class="muted"></p>';
          list.firstChild.textContent = data.lines[0];
          return;
        }
        data.ingredients.forEach(item => {
          const div = document.createElement('div');
          div.className = 'ingredient-item';
          div.textContent = item.label + ' X';
          div.onclick = () => removeIngredient(item.index);
          list.appendChild(div);
        });
      }

      function renderOutput(data) {
        document.getElementById('tab-output').textContent = data.lines.join('\\n');
        document.querySelectorAll('.tab').forEach(t => {
          t.classList.toggle('active', t.dataset.mode === data.mode);
        });
      }

      async function addIngredient() {
        const data = await call('POST', '/ingredients', {
          name: document.getElementById('ingredient-name').value,
          quantity: document.getElementById('ingredient-qty').value,
          unit: document.getElementById('ingredient-unit').value
        });
        if (!data) return;
        renderIngredients(data);
        document.getElementById('ingredient-name').value = '';
        document.getElementById('ingredient-qty').value = '';
        document.getElementById('ingredient-name').focus();
      }

      async function removeIngredient(index) {
        const preview = await call('GET', '/ingredients/' + index);
        if (!preview) return;
        const confirmed = confirm(preview.prompt);
        const data = await call('DELETE', '/ingredients/' + index + '?confirmed=' + confirmed);
        if (data) renderIngredients(data);
      }

      async function calculate() {
        const data = await call('POST', '/calculate', {
          original: document.getElementById('original-servings').value,
          target: document.getElementById('target-servings').value
        });
        if (data) renderOutput(data);
      }

      async function setMode(mode) {
        const data = await call('PUT', '/mode', { mode: mode });
        if (data) renderOutput(data);
      }

      async function init() {
        const units = await call('GET', '/units');
        const select = document.getElementById('ingredient-unit');
        units.units.forEach(u => {
          const option = document.createElement('option');
          option.value = u;
          option.textContent = u;
          select.appendChild(option);
        });
        renderIngredients(await call('GET', '/ingredients'));
        renderOutput(await call('GET', '/output'));
      }

      init();
    </script>
  </body>
</html>
"""
