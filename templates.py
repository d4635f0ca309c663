'''
Interfaz web de TaskFlow. Página única que trabaja contra la API REST.
'''


def get_unified_template():
    return '''
<!DOCTYPE html>
<html lang="es">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>TaskFlow - Gestión de Tareas</title>
    <style>
        :root {
            --primary-gradient: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            --success-gradient: linear-gradient(135deg, #4CAF50, #45a049);
            --danger-gradient: linear-gradient(135deg, #f44336, #d32f2f);
            --white: #ffffff;
            --gray-300: #d1d5db;
            --gray-500: #6b7280;
            --gray-800: #1f2937;
            --radius-lg: 16px;
            --radius-xl: 24px;
            --shadow-md: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
            --shadow-2xl: 0 25px 50px -12px rgba(0, 0, 0, 0.25);
        }

        * { margin: 0; padding: 0; box-sizing: border-box; }

        body {
            font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: var(--primary-gradient);
            min-height: 100vh;
            padding: 1.5rem;
            color: var(--gray-800);
        }

        .container {
            max-width: 720px;
            margin: 0 auto;
            background: rgba(255, 255, 255, 0.95);
            border-radius: var(--radius-xl);
            box-shadow: var(--shadow-2xl);
            overflow: hidden;
        }

        .header {
            background: var(--primary-gradient);
            padding: 2rem;
            text-align: center;
            color: var(--white);
        }

        .task-form {
            display: grid;
            grid-template-columns: 6rem 1fr 9rem;
            gap: 0.75rem;
            padding: 2rem;
        }

        .task-form textarea { grid-column: 1 / -1; }

        .task-input {
            padding: 0.75rem 1rem;
            border: 2px solid rgba(0, 0, 0, 0.06);
            border-radius: var(--radius-lg);
            font-family: inherit;
            font-size: 1rem;
        }

        .add-btn, .action-btn {
            border: none;
            border-radius: var(--radius-lg);
            color: var(--white);
            cursor: pointer;
            font-weight: 600;
            padding: 0.75rem 1rem;
        }

        .add-btn { background: var(--primary-gradient); grid-column: 1 / -1; }
        .complete-btn { background: var(--success-gradient); }
        .delete-btn { background: var(--danger-gradient); }

        .tasks-container { padding: 0 2rem 2rem; }
        .tasks-list { list-style: none; }

        .task-item {
            display: flex;
            align-items: center;
            gap: 1rem;
            padding: 1rem 1.25rem;
            margin-bottom: 0.75rem;
            background: var(--white);
            border-radius: var(--radius-lg);
            box-shadow: var(--shadow-md);
        }

        .task-body { flex: 1; cursor: pointer; }
        .task-numero { color: var(--gray-500); font-weight: 600; }
        .task-tipo { font-size: 0.75rem; color: #764ba2; margin-left: 0.5rem; }
        .task-descripcion { color: var(--gray-500); font-size: 0.875rem; }
        .task-item.completed .task-nombre { text-decoration: line-through; color: var(--gray-300); }
        .task-actions { display: flex; gap: 0.5rem; }

        .toolbar { display: flex; justify-content: space-between; padding: 0 2rem 1rem; color: var(--gray-500); }
        .empty-state { text-align: center; padding: 2rem; color: var(--gray-500); }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>✨ TaskFlow</h1>
            <p class="subtitle">Lista de Tareas - CRUD</p>
        </div>

        <form id="taskForm" class="task-form">
            <input type="number" min="1" id="numero" class="task-input" placeholder="Nº">
            <input type="text" id="nombre" class="task-input" maxlength="{{ nombre_max }}" placeholder="¿Qué necesitas hacer hoy?">
            <select id="tipo" class="task-input">
                {% for tipo in tipos %}
                <option value="{{ tipo }}">{{ tipo }}</option>
                {% endfor %}
            </select>
            <textarea id="descripcion" class="task-input" rows="2" placeholder="Descripción de la tarea"></textarea>
            <button type="submit" class="add-btn">+ Agregar Tarea</button>
        </form>

        <div class="toolbar">
            <span id="summary"></span>
            <button id="clearCompleted" class="action-btn delete-btn">Eliminar completadas</button>
        </div>

        <div class="tasks-container">
            <ul id="tasksList" class="tasks-list"></ul>
        </div>
    </div>

    <script>
        const API = '/api/tasks';
        let tasks = [];
        let loading = false;

        async function request(url, options = {}) {
            const response = await fetch(url, {
                headers: { 'Content-Type': 'application/json' },
                ...options
            });
            const data = await response.json();
            if (!response.ok) {
                throw new Error(data.message || 'Error de conexión');
            }
            return data;
        }

        async function fetchTasks() {
            loading = true;
            render();
            try {
                tasks = await request(API);
            } catch (err) {
                console.error('Error al obtener tareas:', err);
                alert('Error al cargar las tareas');
            } finally {
                loading = false;
                render();
            }
        }

        async function createTask(event) {
            event.preventDefault();
            const nombre = document.getElementById('nombre').value;
            const descripcion = document.getElementById('descripcion').value;
            if (!nombre.trim() || !descripcion.trim()) {
                alert('Por favor ingresa el nombre y la descripción de la tarea');
                return;
            }

            try {
                await request(API, {
                    method: 'POST',
                    body: JSON.stringify({
                        numero: document.getElementById('numero').value,
                        nombre: nombre,
                        tipo: document.getElementById('tipo').value,
                        descripcion: descripcion
                    })
                });
                document.getElementById('taskForm').reset();
                await fetchTasks();
            } catch (err) {
                console.error('Error al crear tarea:', err);
                alert(err.message);
            }
        }

        async function toggleTask(id) {
            try {
                await request(`${API}/${id}/toggle`, { method: 'PATCH' });
                await fetchTasks();
            } catch (err) {
                console.error('Error al actualizar tarea:', err);
                alert('Error al actualizar la tarea');
            }
        }

        async function deleteTask(id) {
            if (!window.confirm('¿Estás seguro de que quieres eliminar esta tarea?')) {
                return;
            }
            try {
                await request(`${API}/${id}`, { method: 'DELETE' });
                await fetchTasks();
            } catch (err) {
                console.error('Error al eliminar tarea:', err);
                alert('Error al eliminar la tarea');
            }
        }

        async function deleteCompleted() {
            if (!window.confirm('¿Eliminar todas las tareas completadas?')) {
                return;
            }
            try {
                const result = await request(`${API}/completed/all`, { method: 'DELETE' });
                console.log(result.message);
                await fetchTasks();
            } catch (err) {
                console.error('Error al eliminar tareas completadas:', err);
                alert('Error al eliminar las tareas completadas');
            }
        }

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text;
            return div.innerHTML;
        }

        function render() {
            const list = document.getElementById('tasksList');
            const completed = tasks.filter(t => t.completed).length;
            document.getElementById('summary').textContent =
                `${tasks.length} tareas · ${completed} completadas`;

            if (loading && tasks.length === 0) {
                list.innerHTML = '<div class="empty-state">Cargando tareas...</div>';
                return;
            }
            if (tasks.length === 0) {
                list.innerHTML = '<div class="empty-state">No hay tareas. ¡Agrega tu primera tarea!</div>';
                return;
            }

            list.innerHTML = tasks.map(task => `
                <li class="task-item ${task.completed ? 'completed' : ''}">
                    <div class="task-body" data-toggle="${task._id}">
                        <div>
                            <span class="task-numero">#${task.numero}</span>
                            <span class="task-nombre">${escapeHtml(task.nombre)}</span>
                            <span class="task-tipo">${escapeHtml(task.tipo)}</span>
                        </div>
                        <div class="task-descripcion">${escapeHtml(task.descripcion)}</div>
                    </div>
                    <div class="task-actions">
                        <button class="action-btn complete-btn" data-toggle="${task._id}">
                            ${task.completed ? 'Desmarcar' : 'Completar'}
                        </button>
                        <button class="action-btn delete-btn" data-delete="${task._id}">Eliminar</button>
                    </div>
                </li>
            `).join('');
        }

        document.getElementById('taskForm').addEventListener('submit', createTask);
        document.getElementById('clearCompleted').addEventListener('click', deleteCompleted);
        document.getElementById('tasksList').addEventListener('click', event => {
            const toggle = event.target.closest('[data-toggle]');
            const remove = event.target.closest('[data-delete]');
            if (remove) {
                deleteTask(remove.dataset.delete);
            } else if (toggle) {
                toggleTask(toggle.dataset.toggle);
            }
        });

        document.addEventListener('DOMContentLoaded', fetchTasks);
    </script>
</body>
</html>
    '''
